from neon_arena.game import main

raise SystemExit(main())
