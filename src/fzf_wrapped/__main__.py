from fzf_wrapped import cli

raise SystemExit(cli.main())
