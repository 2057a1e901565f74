from bloodlink import create_app

# Run the development server: python -m bloodlink
if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)
