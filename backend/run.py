from scoreboard import create_app

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f"{app.config['APP_TITLE']} is running on {port}")
    app.run(port=port, debug=True)
