from jina_mcp_tools.cli import main

main()
