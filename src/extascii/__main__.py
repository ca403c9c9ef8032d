from extascii.cli import main

raise SystemExit(main())
