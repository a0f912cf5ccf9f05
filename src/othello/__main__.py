from othello.main import main

raise SystemExit(main())
