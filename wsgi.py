from quizmaster import create_app

app = create_app()
