from scaffold_bridge.cli import main

raise SystemExit(main())
