from pr_manager import main

main()
