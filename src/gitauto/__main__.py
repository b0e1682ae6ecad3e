from gitauto.cli.cli import main

main()
