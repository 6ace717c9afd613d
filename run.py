from neobind import create_app

app = create_app()

if __name__ == "__main__":
    port = app.config["PORT"]
    print(f"server started at port {port}.")
    app.run(host=app.config["HOST"], port=port, debug=app.config["DEBUG"])
