from corpus_count.cli.main import main

raise SystemExit(main())
