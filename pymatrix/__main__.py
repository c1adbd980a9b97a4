from pymatrix.demo import main

main()
