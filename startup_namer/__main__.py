from startup_namer.app.main import main

main()
