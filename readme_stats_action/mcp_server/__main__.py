from readme_stats_action.mcp_server import main

main()
