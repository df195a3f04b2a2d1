"""services/ -- Administrator and vehicle use cases over db.context.DbContext."""
