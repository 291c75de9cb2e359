from tabfluid.cli.main import main

main()
