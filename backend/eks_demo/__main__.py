from eks_demo.server import main

main()
