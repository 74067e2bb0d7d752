from tick_countdown.app import main

main()
