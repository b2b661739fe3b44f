from .app import create_app


def main():
    app = create_app()
    port = app.config['PORT']
    print(f"Your app is listening on port {port}")
    app.run(host=app.config['HOST'], port=port, threaded=False)


if __name__ == '__main__': main()
