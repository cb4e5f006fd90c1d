from markovalgorithms.cli import main

main()
