from filehost.cli import main

main()
