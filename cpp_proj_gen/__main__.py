from cpp_proj_gen.cli import main

main()
