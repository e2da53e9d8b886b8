from epoch_time.cli import main

main(prog_name="et")
