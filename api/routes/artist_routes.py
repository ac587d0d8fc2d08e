"""
Artist routes for the artist detail page
"""
from flask import Blueprint, request

from ..errors import MethodError


def create_artists_blueprint(artist_service, renderer):
    """Build the artist detail blueprint around the given service and renderer"""
    artists_bp = Blueprint('artists', __name__)

    @artists_bp.route('/artist', methods=['GET'], provide_automatic_options=False)
    def artist_detail():
        """Display detailed information for the artist given by ?id="""
        if request.method != 'GET':
            raise MethodError("Method Not Allowed")

        data = artist_service.build_artist_page(request.args.get('id'))
        return renderer.render('artist.html',
                               failure_message="Failed to render artist page",
                               artist=data.artist,
                               locations=data.locations,
                               dates=data.dates,
                               relations=data.relations)

    return artists_bp
