from shifthours.main import main

raise SystemExit(main())
