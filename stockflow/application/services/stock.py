def is_low(stock_quantity: int, min_stock: int) -> bool:
    """A product is low on stock when it sits at or below its threshold."""
    return stock_quantity <= min_stock
