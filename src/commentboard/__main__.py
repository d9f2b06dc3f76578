from commentboard.cli import main

main()
