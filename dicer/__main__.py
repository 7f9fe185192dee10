from dicer.cli import main

main()
