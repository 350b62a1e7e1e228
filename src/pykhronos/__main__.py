from pykhronos.cli import main

raise SystemExit(main())
