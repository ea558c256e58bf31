from lrc2ass.cli import main

main()
