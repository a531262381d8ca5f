from cookie_investigator.cli import main

main()
