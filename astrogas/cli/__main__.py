from astrogas.cli.main import main

main()
