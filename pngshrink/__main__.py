from pngshrink.cli import main


raise SystemExit(main())
