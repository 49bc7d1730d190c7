from loja_pix import create_app, config


def main():
    app = create_app()
    app.run(debug=False, port=config.PORTA)


if __name__ == '__main__':
    main()
