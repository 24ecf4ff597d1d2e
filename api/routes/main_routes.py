"""
Main routes for the application
"""
from flask import Blueprint
from .error_routes import render_page

main_bp = Blueprint('main', __name__)


@main_bp.route('/', methods=['GET'])
def index():
    """Home page with the search box and a link to the artist list"""
    return render_page('home.html')
