from value_api.server import main

main()
