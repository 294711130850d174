from autograph.application import main

main()
