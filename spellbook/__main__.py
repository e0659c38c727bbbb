from .searcher import main

main()
