from rcflow.cli import main

main()
