from log_proxy.server import main

main()
