from create_fullstack_app.cli import main

main()
