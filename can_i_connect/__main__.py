from can_i_connect.main import main

raise SystemExit(main())
