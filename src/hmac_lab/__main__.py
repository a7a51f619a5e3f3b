from hmac_lab.cli import main

raise SystemExit(main())
