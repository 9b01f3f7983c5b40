from release_notify.cli import main

main()
