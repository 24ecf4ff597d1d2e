"""
Search route over first album and creation dates
"""
from flask import Blueprint, jsonify, request
from .error_routes import render_error
from ..services.artist_service import ArtistService
from ..services.exceptions import TrackerError
from ..services.search_service import SearchService

search_bp = Blueprint('search', __name__)


@search_bp.route('/search', methods=['GET'])
def search():
    """Return the artists whose first album or creation date match ``query`` as JSON"""
    query = request.args.get('query', '')
    if not query:
        return render_error(400, "Query parameter is missing")

    try:
        artists = ArtistService.get_all_artists()
    except TrackerError:
        return render_error(500, "Error fetching artist data")

    results = SearchService.search_dates(artists, query)
    return jsonify([result.model_dump() for result in results])
