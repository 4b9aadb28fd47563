from prompt_refiner.mcp_server import main

main()
