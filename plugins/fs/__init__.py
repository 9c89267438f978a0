CATEGORY_DESCRIPTION = "Inspect files in the working directory."
