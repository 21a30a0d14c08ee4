from thumbsquare.main import main

raise SystemExit(main())
