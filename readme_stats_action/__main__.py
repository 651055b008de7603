from readme_stats_action.cli import main

main()
