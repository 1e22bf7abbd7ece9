from matrix_game_cfr.cli import main

raise SystemExit(main())
