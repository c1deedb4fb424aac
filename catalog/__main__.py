from catalog.api.server import main

main()
