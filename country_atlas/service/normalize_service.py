from toolz import pipe
from country_atlas.errors import BadRequestError


def normalize_payload(schema, payload, partial=True) -> dict:
    """Validate a request body and return column values.

    Nested arrays are coerced record by record (numeric strings become
    numbers, blank numerics become None). With ``partial`` only the fields
    present in the body come back, so a PATCH never clobbers the rest of the
    row, while each array that is present replaces the stored one wholesale.
    """
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")
    return pipe(
        payload,
        schema.model_validate,
        lambda model: model.to_columns(partial=partial)
    )
