from plotbook.cli import main

main()
