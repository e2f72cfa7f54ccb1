from obama64 import main

if __name__ == "__main__":
    main()
