"""Word document text extraction microservice."""
