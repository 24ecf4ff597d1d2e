"""
Artist routes for the artist list and detail pages
"""
from flask import Blueprint, jsonify, request
from .error_routes import PAGE_UNAVAILABLE, render_error, render_page
from ..services.artist_service import ArtistService
from ..services.exceptions import ArtistDataError, ArtistNotFound, SectionNotFound, TrackerError
from ..services.search_service import SearchService

artists_bp = Blueprint('artists', __name__)


@artists_bp.route('/artists', methods=['GET'])
@artists_bp.route('/artists/', methods=['GET'])
def artists():
    """Display every artist, or return the matches for ``q`` as JSON"""
    try:
        artist_list = ArtistService.get_all_artists()
    except TrackerError:
        return render_error(500, "Error fetching artists")

    query = request.args.get('q', '')
    if query:
        results = SearchService.search_artists(artist_list, query)
        return jsonify([artist.model_dump(by_alias=True) for artist in results])

    return render_page('artists.html', artists=artist_list)


@artists_bp.route('/artist/<artist_id>', methods=['GET'])
def artist_detail(artist_id):
    """Display one artist with its dates, locations and relations"""
    section = request.args.get('section', '')
    try:
        artist_data = ArtistService.build_artist_data(artist_id, section)
    except SectionNotFound:
        return render_error(404, "The section you're trying to access is unavailable")
    except ArtistNotFound:
        return render_error(404, PAGE_UNAVAILABLE)
    except ArtistDataError as e:
        return render_error(500, f"Error fetching {e.part}")

    return render_page('artist.html', data=artist_data)
