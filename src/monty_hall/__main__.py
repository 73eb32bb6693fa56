from monty_hall.cli import main

main()
