from loanquote.cli import main

main(prog_name="loanquote")
