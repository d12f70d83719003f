from femto.cli import main

main(prog_name="femto")
