from pi.mdtable.cli import main

main()
