import numpy as np


debugging = False


class variable(object):
	"""
	Scalar field stored on an (Nx+2, Ny+2) array, ghost layer included.

	Indexing is field[i, j] with i along x and j along y. The four Dirichlet
	values are kept with the field and written into the ghost layer by
	applyBoundaryConditions().
	"""
	def __init__(
			self,
			name : str,
			Nx: int,
			Ny: int,
			top : float = 0.0,
			bottom : float = 0.0,
			left : float = 0.0,
			right : float = 0.0):

		self.name = name

		self.Nx = Nx
		self.Ny = Ny

		self.iMax = Nx + 1
		self.jMax = Ny + 1
		self.field = np.zeros((Nx + 2, Ny + 2))

		# Dirichlet boundary values
		self.top = top
		self.bottom = bottom
		self.left = left
		self.right = right

	def initialize(self, value = None):
		"""Fill the whole field (ghost cells included) with a constant or an array."""
		if value is not None:
			self.field[:, :] = value

	# ------------------------------------------------------------------
	# Boundary conditions
	# ------------------------------------------------------------------
	def applyBoundaryConditions(self) -> None:
		"""
		Overwrite the ghost layer with the Dirichlet values.

		The x boundaries are written first and the y boundaries second, so the
		four corner cells end up holding the bottom/top values.
		"""
		self.field[0, :] = self.left
		self.field[self.iMax, :] = self.right

		self.field[:, 0] = self.bottom
		self.field[:, self.jMax] = self.top

		if debugging:
			print(f"Boundary conditions applied to {self.name}")

	@property
	def interior(self) -> np.ndarray:
		return self.field[1:self.iMax, 1:self.jMax]

	def __getitem__(self, index):
		return self.field[index]

	def __setitem__(self,index,value):
		self.field[index] = value
		return None

	def __str__(self):
		fmt = "{:10.4f}"
		nx, ny = self.field.shape  # nx = i-direction, ny = j-direction

		lines = [f"Field '{self.name}' (shape={self.field.shape}):"]

		for i in range(nx):
			line = "".join(fmt.format(self.field[i, j]) for j in range(ny))
			lines.append(line)

		return "\n".join(lines)


if __name__ == "__main__":

	testField = variable("testField", 6, 4, top=4.0, bottom=3.0, left=1.0, right=2.0)
	testField.initialize(0.5)
	testField.applyBoundaryConditions()

	print(testField)
	print("Nx, Ny:", testField.Nx, testField.Ny)
	print("iMax, jMax:", testField.iMax, testField.jMax)
	print("field.shape:", testField.field.shape)
	print("Boundary values (top, bottom, left, right):", testField.top, testField.bottom, testField.left, testField.right)
