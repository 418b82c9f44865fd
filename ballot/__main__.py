from ballot.deploy import main

main()
