"""Saving and loading of model parameters.

Every concrete model parameters class registers itself with registerModelParameters(), under its
class name. serialize() stores this name next to the class' own dictionary (see toDict()), so
deserialize() can construct the correct class again with fromDict().

The archive is a JSON file of the following format:

.. code-block:: none

    {
        "class": "ModelParametersRBFN",
        "parameters": {
            "selected_parameters": [],
            "centers": [[0.0], [1.0]],
            ...
        }
    }

Archives carry no version information.
"""
import os
import json
from FunctionApproximators import setup_logger

archive_logger = setup_logger.logger.getChild("archive")

_registry = {}


class ArchiveError(Exception):
    pass


def registerModelParameters(cls):
    """Class decorator adding a model parameters class to the registry.

    :raises ValueError: if a class with the same name was registered before
    """
    tag = cls.__name__
    if tag in _registry and _registry[tag] is not cls:
        raise ValueError("Model parameters class " + tag + " is already registered.")
    _registry[tag] = cls
    return cls


def getRegisteredModelParameters():
    """Returns the names of all registered model parameters classes.

    :rtype: list of strings
    """
    return sorted(_registry.keys())


def serialize(model_parameters):
    """Converts model parameters to a JSON compatible dictionary.

    :param model_parameters: model parameters to serialize
    :type model_parameters: ModelParameters
    :raises ArchiveError: if the class of model_parameters is not registered
    :return: dictionary containing the class name and the parameters
    :rtype: dict
    """
    tag = type(model_parameters).__name__
    if _registry.get(tag) is not type(model_parameters):
        raise ArchiveError("Model parameters class " + tag + " is not registered.")

    return {"class": tag, "parameters": model_parameters.toDict()}


def deserialize(dictionary):
    """Constructs model parameters from a dictionary created by serialize().

    :param dictionary: the serialized model parameters
    :type dictionary: dict
    :raises ArchiveError: if the class is unknown or the dictionary is malformed
    :return: model parameters
    :rtype: ModelParameters
    """
    if not isinstance(dictionary, dict) or "class" not in dictionary or "parameters" not in dictionary:
        raise ArchiveError("Archive is malformed.")

    tag = dictionary["class"]
    if tag not in _registry:
        raise ArchiveError("Unknown model parameters class " + str(tag) + ".")

    try:
        return _registry[tag].fromDict(dictionary["parameters"])
    except (KeyError, TypeError, ValueError) as exception:
        raise ArchiveError("Could not restore " + tag + ": " + str(exception)) from exception


def saveModelParameters(filename, model_parameters, overwrite=True):
    """Saves model parameters to a JSON file. If a path is specified, the directories will be
    created if not yet existent.

    :param filename: file to write
    :type filename: string
    :param model_parameters: model parameters to save
    :type model_parameters: ModelParameters
    :param overwrite: whether to overwrite an existing file
    :type overwrite: bool, optional
    :raises ArchiveError: if the class of model_parameters is not registered
    :return: whether the file was written
    :rtype: bool
    """
    if os.path.exists(filename) and not overwrite:
        archive_logger.warning("File %s already exists, not overwriting it.", filename)
        return False

    archive = serialize(model_parameters)

    directory = os.path.dirname(filename)
    if directory != "":
        os.makedirs(directory, exist_ok=True)

    with open(filename, "w") as f:
        json.dump(archive, f, indent=2)

    archive_logger.debug("Saved %s to %s", type(model_parameters).__name__, filename)
    return True


def loadModelParameters(filename):
    """Loads model parameters from a JSON file written by saveModelParameters().

    :param filename: file to read
    :type filename: string
    :raises ArchiveError: if the file is missing, not valid JSON or not a valid archive
    :return: model parameters
    :rtype: ModelParameters
    """
    if not os.path.isfile(filename):
        raise ArchiveError("No archive found at " + filename + ".")

    try:
        with open(filename) as f:
            archive = json.load(f)
    except json.JSONDecodeError as exception:
        raise ArchiveError("Error parsing json file: " + exception.msg) from exception
    except UnicodeDecodeError as exception:
        raise ArchiveError("Archive " + filename + " is not a text file: " + str(exception)) from exception
    except OSError as exception:
        raise ArchiveError("Could not read archive " + filename + ": " + str(exception)) from exception

    return deserialize(archive)
