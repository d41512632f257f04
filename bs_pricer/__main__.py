from bs_pricer.runner import main

raise SystemExit(main())
