"""
Jinja filters for displaying upstream slugs and dates
"""


def location_name(slug):
    """north_carolina-usa -> North Carolina, USA"""
    place, _, country = slug.rpartition('-')
    if not place:
        place, country = country, ''
    place = place.replace('_', ' ').title()
    country = country.replace('_', ' ')
    country = country.upper() if len(country) <= 3 else country.title()
    return f"{place}, {country}" if country else place


def concert_date(date):
    return date.lstrip('*')


def register_filters(app):
    app.add_template_filter(location_name, 'location_name')
    app.add_template_filter(concert_date, 'concert_date')
