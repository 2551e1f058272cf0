from faker_server.server import main

main()
