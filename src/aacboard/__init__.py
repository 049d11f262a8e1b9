"""AAC communication boards: categories of pictures mapped to spoken text."""
