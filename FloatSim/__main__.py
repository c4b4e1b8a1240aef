from FloatSim.runner import main

main()
