from . import setup_logger
from .parametermanagement.parameterizable import Parameterizable
from .basisfunctions.basisFunctions import generateInputsGrid, gaussianKernelActivations, linesResponse, squaredExponentialCovariance
from .serialization.modelParametersArchive import ArchiveError, registerModelParameters, getRegisteredModelParameters, serialize, deserialize, saveModelParameters, loadModelParameters
from .modelparameters.modelParameters import ModelParameters, render
from .modelparameters.modelParametersUnified import ModelParametersUnified
from .modelparameters.modelParametersRBFN import ModelParametersRBFN
from .modelparameters.modelParametersLWR import ModelParametersLWR
from .modelparameters.modelParametersGPR import ModelParametersGPR
from .modelparameters.modelParametersPolynomialRegression import ModelParametersPolynomialRegression
