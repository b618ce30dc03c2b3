# Importing the model modules registers every table on Base.metadata.
from model import usermodels, Project_model, timesheet_model, token_model  # noqa: F401
