from flask_restx import fields


def create_models(api):
    form_model = api.model('BookmarkForm', {
        'title': fields.String(description='The bookmark title'),
        'url': fields.String(description='The bookmark URL; https:// is assumed when no scheme is given'),
        'tags': fields.String(description='Comma-separated tags'),
        'note': fields.String(description='Free-text note')
    })

    bookmark_model = api.model('Bookmark', {
        'id': fields.String(description='Stable bookmark id'),
        'title': fields.String(description='The bookmark title'),
        'url': fields.String(description='The bookmark URL'),
        'urlType': fields.String(description='Detected link type', example='GitHub'),
        'tags': fields.List(fields.String, description='List of tags'),
        'note': fields.String(description='Free-text note'),
        'savedAt': fields.String(description='ISO-8601 save time')
    })

    status_model = api.model('StatusMessage', {
        'message': fields.String(description='Short message for the user'),
        'tone': fields.String(description='idle, success or error'),
        'dismissAfterMs': fields.Integer(description='Auto-dismiss delay', allow_null=True)
    })

    return form_model, bookmark_model, status_model
