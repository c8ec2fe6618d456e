from wordpane_audit.cli import main

raise SystemExit(main())
