from citybars.cli import main

main()
