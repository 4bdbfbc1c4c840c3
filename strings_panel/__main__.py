from strings_panel.main import main

main()
