from nsmerge.cli import main

main()
