from flask import request
from flask_restx import Namespace, Resource
from ..errors import MissingCredentialError, OperationInProgressError, SummaryError
from ..services.draft_service import DEFAULT_FORM_FIELDS
from ..services.summary_service import prefill_fields
from ..utils.status import error_response, status_message
import asyncio
import logging

autofill_ns = Namespace('autofill', description='Summarize an article to pre-fill the bookmark form')
logger = logging.getLogger(__name__)

@autofill_ns.route('/')
class Autofill(Resource):
    @autofill_ns.doc('autofill',
        description='Fetch the article, ask the language model for a summary and tags, '
                    'and return the form fields filled from them.',
        params={'url': 'Article URL'},
        responses={
            200: 'Success. Returns the summary and pre-filled fields.',
            400: 'Bad request. No URL given.',
            409: 'The same URL is already being summarized.',
            422: 'The article could not be fetched or has too little text.',
            500: 'Server error. The summary service failed or is not configured.'
        })
    def get(self):
        """Auto-fill from an article"""
        url = request.args.get('url', '').strip()
        if not url:
            return error_response('Please provide a URL to auto-fill from.', 400)

        try:
            with autofill_ns.in_flight.claim(f'autofill:{url}'):
                loop = asyncio.new_event_loop()
                try:
                    summary = loop.run_until_complete(autofill_ns.summary_service.summarize(url))
                finally:
                    loop.close()
        except OperationInProgressError:
            return error_response('Auto-fill is already running for this URL.', 409)
        except MissingCredentialError as e:
            logger.error(f"Auto-fill is not configured: {str(e)}")
            return error_response(f'Auto-fill failed: {str(e)}', 500)
        except SummaryError as e:
            return error_response(f'Auto-fill failed: {str(e)}', e.status_code)

        fields = prefill_fields(dict(DEFAULT_FORM_FIELDS, url=url), summary)
        return {
            **summary.to_dict(),
            'fields': fields,
            'status': status_message('Content auto-filled successfully!', 'success')
        }, 200
