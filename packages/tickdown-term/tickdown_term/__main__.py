from tickdown_term.cli import main

raise SystemExit(main())
