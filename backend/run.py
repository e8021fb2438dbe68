from leaderboard import create_app, socketio

app = create_app()

if __name__ == '__main__':
    socketio.run(app, host=app.config['LISTEN_HOST'], port=app.config['LISTEN_PORT'],
                 allow_unsafe_werkzeug=True)
