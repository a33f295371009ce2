from moviebattle.main import main

raise SystemExit(main())
