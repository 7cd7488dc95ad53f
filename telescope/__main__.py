from telescope.repl import main

main()
