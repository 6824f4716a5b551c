from reportkit.cli.app import main

main()
