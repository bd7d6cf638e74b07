from bikeshop.demo import run_demo

if __name__ == "__main__":
    run_demo()
