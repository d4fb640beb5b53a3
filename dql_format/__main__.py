from dql_format.cli.app import app

if __name__ == "__main__":
    app(prog_name="dql-format")
