from greyhack_mcp.server.cli import main

main()
