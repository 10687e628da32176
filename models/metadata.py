from models.enums import DataType
from models.field_metadata import FieldMetadata

metadata_customer = {
    'age': FieldMetadata(DataType.INTEGER, min_value=18, max_value=80),
    'income': FieldMetadata(DataType.INTEGER, min_value=20000),
    'purchase_amount': FieldMetadata(DataType.DECIMAL, decimal_places=1, min_value=0),
    'satisfaction': FieldMetadata(DataType.DECIMAL, decimal_places=1, min_value=1, max_value=10),
}

