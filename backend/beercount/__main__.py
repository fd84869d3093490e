from beercount.server import main

main()
