"""
Request body helpers

Handlers accept JSON bodies and form-encoded bodies alike.
"""

from quart import request


async def read_payload() -> dict:
    """
    Return the request body as a dict

    A JSON body that fails to parse raises BadRequest, which the app's
    generic error handler turns into a 500 payload.
    """
    if request.is_json:
        data = await request.get_json()
        return data if isinstance(data, dict) else {}

    form = await request.form
    return form.to_dict()
