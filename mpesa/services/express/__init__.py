"""
Lipa na M-Pesa Online (STK push)
"""

from mpesa.services.express.express_query import ExpressQueryBuilder
from mpesa.services.express.express_request import ExpressRequestBuilder
from mpesa.services.express.password import TIMESTAMP_FORMAT, encode_password, generate_password

__all__ = [
    'ExpressQueryBuilder',
    'ExpressRequestBuilder',
    'TIMESTAMP_FORMAT',
    'encode_password',
    'generate_password',
]
