"""Example script decoding JSON payloads."""
import json
import decoders as d
from decoders.config import DecoderSettings


address = d.object({
    'street': d.string,
    'city': d.string,
    'zip': d.optional(d.union(d.string, d.number)),
})

contact = d.object({
    'email': d.optional(d.string),
    'phone': d.optional(d.string),
})

user = d.merge(
    d.object({
        'id': d.number,
        'name': d.string,
        'role': d.literal('admin', 'editor', 'viewer'),
        'manager': d.union(d.number, d.null),
    }),
    d.object({'address': address}),
    contact
)


def decode_user(payload: str):
    """Decode one user payload and report the outcome."""
    try:
        result = user.decode(json.loads(payload))
    except d.ValidationError as e:
        print(f"invalid: {e.message} {e.details}")
        return None
    except d.TypeMismatchError as e:
        print(f"wrong shape: {e.message}")
        return None
    print(f"decoded: {result}")
    return result


if __name__ == "__main__":
    DecoderSettings.from_env().apply()

    decode_user(json.dumps({
        'id': 1, 'name': 'Ada', 'role': 'admin', 'manager': None,
        'address': {'street': 'Main St 1', 'city': 'London'},
        'email': 'ada@example.com',
    }))
    decode_user(json.dumps({
        'id': 2, 'name': 'Bob', 'role': 'owner', 'manager': 1,
        'address': {'street': 'High St 2', 'city': 'Leeds', 'zip': 12345},
    }))
    decode_user(json.dumps({
        'id': 3, 'name': 'Eve', 'role': 'viewer', 'manager': 1,
        'address': 'unknown',
    }))
